from bouncestack.main import main

main()
