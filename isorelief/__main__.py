from isorelief.cli import main

raise SystemExit(main())
