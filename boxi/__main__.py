"""Запуск через python -m boxi."""

import sys

from boxi.main import main

sys.exit(main())
