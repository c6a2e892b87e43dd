# Suggestions are computed, not stored.
# Reads (in order): profiles, matches, notifications (type = match_request),
# blocked_users (both directions), profiles again for candidates, users for
# privacy flags. See the models.py of the profiles, connections,
# notifications, blocks and users modules for the table layouts.

"""
Response contract of GET/POST /api/v1/suggestions:

200 {"suggestions": [Candidate, ...]}           ranked, highest score first
200 {"suggestions": [], "message": "..."}       caller has no profile yet
401 {"error": "..."}                            missing/invalid bearer token
500 {"error": "..."}                            any backend read failed

Candidate: profile_id, user_id, profile_username, profile_bio,
profile_birthdate, profile_academic_interests, profile_non_academic_interests,
profile_looking_for, profile_avatar_url, profile_gender, profile_phone,
user_priset_show_age, user_priset_show_bio, user_priset_is_private,
compatibility_score
"""
