"""Test configuration and fixtures."""

import logfire

# Keep spans local; nothing is exported while tests run
logfire.configure(send_to_logfire=False, console=False)
