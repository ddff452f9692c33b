from graverobber.cli.main import main

main()
