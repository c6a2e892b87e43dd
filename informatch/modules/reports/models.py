# Supabase table: reports
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

reports:
- reports_id: serial (primary key)
- reporter_id: uuid (foreign key to users.user_id, not null)
- reported_id: uuid (foreign key to users.user_id, not null)
- reason: text (nullable) - e.g. harassment, spam, fake_profile, inappropriate_content, other
- details: text (not null)
- reported_at: timestamp (default: now())

RLS: users insert reports where they are the reporter; nobody reads them
through the public API.
"""
