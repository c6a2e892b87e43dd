# Supabase Auth
# This module relies on Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - Sign up, sign in and session management (client side)
# - JWT token issuing and refresh

"""
This service only verifies tokens:
- auth.get_user(jwt=...) - Resolve the bearer token to the auth.users record

The public.users row (privacy settings) is created from that record by the
users module on first access.
"""
