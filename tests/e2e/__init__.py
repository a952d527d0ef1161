"""
Automation Exercise E2E Test Suite

End-to-end browser tests using Playwright and the page objects in
automation_exercise.pages.

Running Tests:
    # Run all browser tests
    AE_RUN_LIVE=true pytest tests/e2e/

    # Run with visible browser
    AE_RUN_LIVE=true pytest tests/e2e/ --headed

    # Run specific browser
    AE_RUN_LIVE=true pytest tests/e2e/ --browser firefox

    # Run smoke tests only
    AE_RUN_LIVE=true pytest tests/e2e/ -m smoke
"""
