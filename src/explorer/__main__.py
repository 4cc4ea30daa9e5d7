from explorer.main import main

main()
