from recipe_scraper.cli import main

raise SystemExit(main())
