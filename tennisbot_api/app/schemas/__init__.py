"""
Pydantic schema definitions for API payloads.

Request models are deliberately lenient (all fields optional) and the
services report missing values, so that the API answers with its own
400 messages.  Stored records use the same models as the responses.
"""
