# Supabase tables: matches, notifications (type = match_request)
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

matches (accepted connections only, existence implies acceptance):
- match_id: serial (primary key)
- match_user1_id: uuid (foreign key to users.user_id, not null) - requester
- match_user2_id: uuid (foreign key to users.user_id, not null) - accepter
- matched_at: timestamp (default: now())
- unique constraint on (match_user1_id, match_user2_id)
- check constraint matches_no_self_match: match_user1_id != match_user2_id

Pending requests are rows of the notifications table (see
modules/notifications/models.py) with type = 'match_request',
from_user_id = requester and user_id = recipient.

State machine per unordered pair:
  none -> pending (notification) -> accepted (match row, notification deleted)
  none -> pending (notification) -> none (notification deleted, no tombstone)
  none -> accepted directly when the recipient's account is private
  accepted -> none (match row deleted by either party)
"""
