from sprig.cmdline import main

main()
