from makekit.cli import main

raise SystemExit(main())
