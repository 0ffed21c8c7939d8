from termarcade.main import main

main()
