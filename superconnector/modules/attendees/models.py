# Supabase table: superconnector_attendees
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py and roster.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- event_id: uuid (foreign key to superconnector_events.id, not null)
- user_id: uuid (foreign key to superconnector_profiles.id, not null)
- rsvp_status: text (not null) - values: going, maybe, not_going
- created_at: timestamp (default: now()) - arrival order of the roster
- updated_at: timestamp (nullable)
- unique constraint on (event_id, user_id); writes upsert on that pair

Rows are never deleted. A user with no row has not responded yet.
"""
