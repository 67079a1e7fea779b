from memberaccess.cli import main

main()
