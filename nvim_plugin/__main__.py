from nvim_plugin.cli import main

main()
