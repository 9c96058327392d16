from dirsim.cli import main

raise SystemExit(main())
