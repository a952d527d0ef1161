"""
Automation Exercise Test Suite

Test categories:
- unit/ - Offline tests for data, helpers and page object fallbacks
- api/  - REST API tests against the live site
- e2e/  - Browser journeys against the live site
"""
