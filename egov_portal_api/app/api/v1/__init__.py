"""
Version 1 of the API.

This subpackage bundles all endpoints of the portal API.  Version 1 is
served under the unversioned ``/api`` prefix that existing portal
pages call; breaking changes belong in a new subpackage (e.g. ``v2``).
"""
