from rewardagent.cli.main import main

main()
