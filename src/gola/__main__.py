from gola.cli import main

raise SystemExit(main())
