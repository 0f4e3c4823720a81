# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Module entry point so ``python -m oxlint_disable`` behaves like the console script."""

from __future__ import annotations

from .cli.app import main

if __name__ == "__main__":
    main()
