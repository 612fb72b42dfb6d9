"""Test configuration."""

import logfire

# Keep Logfire local during tests: no export, no console noise
logfire.configure(send_to_logfire=False, console=False)
