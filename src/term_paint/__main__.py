from term_paint.cli.main import main

main()
