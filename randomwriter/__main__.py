from randomwriter.random_writer import main

if __name__ == '__main__':
    main()
