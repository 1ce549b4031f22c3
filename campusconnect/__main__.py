from campusconnect.main import main

main()
