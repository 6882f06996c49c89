from commitm.cli import main

raise SystemExit(main())
