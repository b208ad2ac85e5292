from user_directory_api.server import main


main()
