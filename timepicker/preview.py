#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import json
from typing import List

from .time_parser import parse_time
from .formatter import format_time, format_24h
from .logger import setup_logger
from .config import get_testing_mode

# Get logger
logger = setup_logger('preview', testing=get_testing_mode())


class TimePreview:
    def generate_items(self, text: str) -> List[dict]:
        """Generate preview items"""
        logger.debug(f"Generating preview for: {text}")
        parsed = parse_time(text)

        if parsed is None:
            return [{
                "title": "Invalid time",
                "subtitle": f"Could not read \"{text.strip()}\" as a time",
                "valid": False,
                "icon": {"path": "icon.png"}
            }]

        display = format_time(parsed)
        return [{
            "title": display,
            "subtitle": f"{format_24h(parsed)} (24-hour)",
            "arg": display,
            "valid": True,
            "icon": {"path": "icon.png"}
        }]


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(json.dumps({
            "items": [{
                "title": "Type a time...",
                "subtitle": "e.g. 9am, 11 PM, 23:45 or 12:15:50 PM",
                "valid": False,
                "icon": {"path": "icon.png"}
            }]
        }))
        return

    query = " ".join(args)
    preview = TimePreview()
    items = preview.generate_items(query)
    print(json.dumps({"items": items}))


if __name__ == "__main__":
    main()
