from saizeriya.cli import main

main()
