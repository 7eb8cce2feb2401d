from fleetdash.cli import main

raise SystemExit(main())
