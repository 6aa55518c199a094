from __future__ import annotations

import os

from page_model_adapter.logging_config import setup_logging
from page_model_adapter.service import create_app

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
ALLOW_IMPLICIT_DOWNGRADE = os.getenv("ALLOW_IMPLICIT_DOWNGRADE", "false").lower() in {"1", "true", "yes"}

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

app = create_app(allow_implicit_downgrade=ALLOW_IMPLICIT_DOWNGRADE)
