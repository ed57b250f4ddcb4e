from sunlens.cli import main

raise SystemExit(main())
