# pathfixer\__main__.py
from pathfixer.cli import main

raise SystemExit(main())
