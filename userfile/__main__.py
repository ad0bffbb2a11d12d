from userfile.cli import main

raise SystemExit(main())
