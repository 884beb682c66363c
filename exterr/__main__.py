from exterr.cli.app import main

main()
