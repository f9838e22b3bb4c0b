# Supabase Auth
# Sign-in is passwordless: Supabase sends a magic link / one-time code by email.
# Phone sign-ups are mapped to an email address on the app's domain.
# No custom tables are required - Supabase Auth handles:
# - User creation on first OTP sign-in (auth.users table)
# - Session management and JWT issuing
# - Magic link / OTP delivery

"""
Supabase Auth calls used here:
- auth.sign_in_with_otp() - Send a magic link / code, creating the user if needed
- auth.verify_otp() - Exchange a code for a session
- auth.get_user() - Resolve a JWT to its user
- auth.sign_out() - End the session

User metadata (name, phone) is stored in the user_metadata field at sign-up.
Profiles live in superconnector_profiles (see modules/profiles/models.py).
"""
