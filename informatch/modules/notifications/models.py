# Supabase table: notifications
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

notifications:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.user_id, not null) - recipient
- from_user_id: uuid (foreign key to users.user_id, nullable) - actor
- type: text (not null) - match_request | match_accepted | match_rejected | general
- message: text (nullable)
- read: boolean (default: false)
- match_request_id: uuid (default: gen_random_uuid())
- created_at: timestamp (default: now())
- unique partial index on (from_user_id, user_id) where type = 'match_request'

A row with type match_request is a pending connection request. Accepting it
creates a matches row and deletes the notification; rejecting only deletes it.

RLS: recipients read/update their notifications, actors insert rows where
they are from_user_id, either party may delete.
"""
