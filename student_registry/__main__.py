from student_registry.cli.main import main

raise SystemExit(main())
