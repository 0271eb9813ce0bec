from .showcase_app import main

main()
