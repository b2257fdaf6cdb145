from hubfork.cli import main

main()
