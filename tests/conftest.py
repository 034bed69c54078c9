"""Test configuration and fixtures."""

import logfire

# Local-only, quiet logging for the test run
logfire.configure(send_to_logfire=False, console=False)
