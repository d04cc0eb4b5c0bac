"""
Business logic for the portal.

One service class per domain: catalog browsing, applications and
tracking, appointments, reviews, the contact form, static content and
the election section.  Services receive the ``DataStore`` in their
constructor and raise ``core.errors`` exceptions; they never build
HTTP responses themselves.
"""
