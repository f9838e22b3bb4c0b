# Supabase table: superconnector_profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

superconnector_profiles:
- id: uuid (primary key, references auth.users.id)
- name: text (nullable)
- bio: text (nullable)
- interests: text[] (nullable)
- twitter: text (nullable)
- phone: text (nullable)
- looking_for: text (nullable)
- avatar_url: text (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Rows are created by the first upsert from the owning user. Creating the auth
account and the profile is not atomic, so a signed-in user may have no row.
"""
