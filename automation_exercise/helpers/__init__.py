"""
Test support for the Automation Exercise suite.

Modules:
    user_data       - Records and generators for form and API payloads
    test_helpers    - Small conversions between those records
    consent_helper  - Consent overlay handling
    download_cleanup- Downloads scratch directory
    api_helpers     - REST client and envelope assertions
    e2e_validators  - Multi-step UI checks
    fixtures        - Page object bundle and download scoping
"""
