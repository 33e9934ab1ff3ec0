from playpub.cli.app import main

main()
