from lispr.main import main

main()
