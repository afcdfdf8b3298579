from watermark_manager.cli.session import main

if __name__ == "__main__":
    main()
