from labelmaker.cli import main

main()
