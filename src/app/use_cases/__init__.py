"""
Use Cases

Organized into domain folders:
- tenants/: Tenant resolution, onboarding and membership
- admin/: System administration (admin API key)
- permissions/: Permission evaluation and default seeding
- audit/: Audit trail
- clients/, cases/: Practice records

Import from subdirectories.
"""
