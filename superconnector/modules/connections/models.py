# Supabase table: connections
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (not null) - who asked for the intro
- connection_id: uuid (not null) - who they want to meet
- created_at: timestamp (default: now())
- unique constraint on (user_id, connection_id)
"""
