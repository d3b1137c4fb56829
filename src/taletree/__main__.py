from taletree.main import main

main()
