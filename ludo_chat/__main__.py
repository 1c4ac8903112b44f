from .simulate import main

main()
