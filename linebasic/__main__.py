from __future__ import annotations

from linebasic.cli import main

raise SystemExit(main())
