from explainshell_cli.cli import main

raise SystemExit(main())
