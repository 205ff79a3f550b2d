#!/usr/bin/env python3
"""
Local entrypoint for the LiquidGen calculator API.

Host, port and log level come from LIQUIDGEN_* environment variables.
"""

from liquidgen_app.main import app, run


if __name__ == "__main__":
    run()
