"""
auth — User authentication module.

Provides:
  • Signed bearer token issuance & validation
  • Password hashing (bcrypt, tunable work factor)
  • Signup / Login API routes
  • ``get_auth_context`` FastAPI dependency gating protected routes
"""
