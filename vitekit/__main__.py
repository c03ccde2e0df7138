from vitekit.cli import main

main()
