#!/usr/bin/env python3
"""
Match Card - Main Entry Point
Renders team rosters as printable one-page match cards

Copyright (c) 2025 [Your Name]. All Rights Reserved.
This software is proprietary and confidential. Unauthorized copying, modification,
distribution, or use of this software, via any medium, is strictly prohibited.
"""

from matchcard.main import main

if __name__ == '__main__':
    main()
