from roster_pipeline.demo import main

raise SystemExit(main())
