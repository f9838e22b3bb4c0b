# Supabase table: superconnector_events
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- title: text (not null)
- description: text (nullable)
- location: text (nullable)
- start_time: timestamp (not null)
- end_time: timestamp (not null)
- creator_id: uuid (foreign key to auth.users.id, not null)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Events are readable by everyone and have no edit path once created.
"""
