from whisky_api.api.app import main

main()
