from nodeip.cli import main

main()
