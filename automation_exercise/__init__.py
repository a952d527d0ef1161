"""
Automation Exercise E2E Suite

Page objects, data generators and assertion helpers for browser and API
tests against https://automationexercise.com.

Structure:
    config.py   - Environment-driven settings
    pages/      - Page Object Models
    helpers/    - Test data, consent handling, downloads, API and UI oracles

Running Tests:
    pip install -e ".[test]"
    playwright install chromium

    # Offline unit tests
    pytest tests/unit

    # Live browser and API tests
    AE_RUN_LIVE=true pytest tests/

    # Run with visible browser
    AE_RUN_LIVE=true pytest tests/e2e --headed
"""

__version__ = "1.0.0"
