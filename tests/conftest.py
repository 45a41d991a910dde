"""Global test fixtures."""

import os
import tempfile

import logfire

# Set JWT secret before any test modules import Config
# This must happen at module load time, not in a fixture
os.environ.setdefault("HRM_AUTH__JWT__SECRET", "test-secret-for-unit-tests-min-32")
os.environ.setdefault("HRM_DATA_DIR", tempfile.mkdtemp(prefix="hrm-tests-"))

logfire.configure(send_to_logfire=False, console=False)
