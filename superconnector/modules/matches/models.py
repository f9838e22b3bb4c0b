# Supabase table: superconnector_attendee_matches
# This file documents the expected database schema
# Rows are written by an external matching job; this service only reads them.

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to superconnector_events.id, nullable)
- user_id: uuid (foreign key to superconnector_profiles.id, nullable) - the viewer
- match_id: uuid (foreign key to superconnector_profiles.id, nullable) - the candidate
- match_score: numeric (not null)
- match_reason: text (nullable)
- created_at: timestamp (default: now())
"""
