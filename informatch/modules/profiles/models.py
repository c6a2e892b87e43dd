# Supabase tables: profiles, profile_images
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- profile_id: serial (primary key)
- user_id: uuid (foreign key to users.user_id, unique, not null)
- profile_username: text (unique, not null)
- profile_bio: text (nullable)
- profile_birthdate: date (not null)
- profile_academic_interests: text (nullable) - comma-separated, e.g. "AI, Security"
- profile_non_academic_interests: text (nullable) - comma-separated
- profile_looking_for: text (nullable)
- profile_avatar_url: text (nullable)
- profile_gender: text (nullable)
- profile_phone: text (nullable)
- profile_created_at: timestamp (default: now())

profile_images:
- image_id: serial (primary key)
- profile_id: integer (foreign key to profiles.profile_id, on delete cascade)
- image_url: text (not null) - public URL in object storage
- image_order: integer (not null, 1..3)
- uploaded_at: timestamp (default: now())
- unique constraint on (profile_id, image_order)

RLS: profiles and images are readable by every authenticated user and
writable only by the owning user.
"""
