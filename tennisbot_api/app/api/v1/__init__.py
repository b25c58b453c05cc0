"""
Version 1 of the API.

Breaking changes to the order API should go into a new version
subpackage (e.g. ``v2``) so that existing storefront clients keep
working.
"""
