from finances_app.main import main

main()
