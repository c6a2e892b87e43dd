# Supabase table: blocked_users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

blocked_users:
- blocker_id: uuid (foreign key to users.user_id, not null, on delete cascade)
- blocked_id: uuid (foreign key to users.user_id, not null, on delete cascade)
- blocked_at: timestamp (default: now())
- primary key (blocker_id, blocked_id)
- check constraint blocked_users_no_self_block: blocker_id != blocked_id

RLS: a user sees, creates and deletes only rows where they are the blocker.
Reading "who blocked me" therefore needs the service role client.
"""
