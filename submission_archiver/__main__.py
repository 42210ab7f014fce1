from submission_archiver.cli import main

raise SystemExit(main())
