# Copyright (c) Rich Connexions Ltd. All rights reserved.
# Licensed under the MIT License. See LICENSE for details.
"""saidify configuration.

Normative constants are fixed by the encoding rules. Configurable
defaults may be overridden via environment variables.
"""

import os

# =============================================================================
# NORMATIVE CONSTANTS
# =============================================================================

PAD_CHARACTER: str = "#"

# =============================================================================
# CONFIGURABLE DEFAULTS
# =============================================================================

DEFAULT_LABEL: str = os.getenv("SAIDIFY_DEFAULT_LABEL", "d")
DEFAULT_CODE: str = os.getenv("SAIDIFY_DEFAULT_CODE", "E")
DEFAULT_KIND: str = os.getenv("SAIDIFY_DEFAULT_KIND", "JSON").upper()

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL: str = os.getenv("SAIDIFY_LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv("SAIDIFY_LOG_FORMAT", "json")
