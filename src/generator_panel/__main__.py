#!/usr/bin/env python3
"""
Generator Panel - Package Entrypoint

This allows the generator_panel package to be executed directly:
    python3 -m generator_panel

It simply delegates execution to generator_panel.launcher.main().
"""

from generator_panel.launcher import main

if __name__ == "__main__":
    main()
