# Supabase tables: users, auth.users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

users:
- user_id: uuid (primary key, references auth.users.id)
- user_email: text (not null) - copied from auth.users
- user_phone: text (nullable)
- user_created_at: timestamp (default: now())
- user_email_verified: boolean (default: false)
- user_phone_verified: boolean (default: false)
- user_priset_is_private: boolean (default: false) - connect requests need approval
  unless private, in which case connecting is an instant match
- user_priset_show_age: boolean (default: true)
- user_priset_show_bio: boolean (default: true)
- user_priset_last_updated: timestamp (default: now())

RLS: a user may only update their own row.
"""
