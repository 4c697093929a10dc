"""
Business logic behind the risk endpoints: body decoding, validation
rules and identifier assignment.  Nothing here depends on HTTP.
"""
