#!/usr/bin/env python3
"""
HMS Look and Feel - Preview Entry Point
=======================================

Starts the Qt application with the configured look and feel and opens a
window painted with the rendering helpers.
"""

import sys

from hms_laf.app import main

if __name__ == "__main__":
    sys.exit(main())
