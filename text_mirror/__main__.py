from text_mirror.server import main

main()
