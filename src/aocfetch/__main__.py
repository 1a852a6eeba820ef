from aocfetch.cli import main

main()
