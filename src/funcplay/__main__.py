from funcplay.playground import main

if __name__ == "__main__":
    main()
