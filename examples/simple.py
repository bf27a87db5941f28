# simple.py

from crayon import Style, RED, BLACK, BLUE, query_screen_size

def main():
    print(RED.on(BLACK).blink().paint("Hello world!"))
    print(f"This will be {Style.new().foreground(RED).bold().paint('red and bold')} "
          f"and this will be {BLUE.italic().paint('blue and italic')}.")

    size = query_screen_size()
    if size:
        print(f"The screen size is {size}.")

if __name__ == "__main__":
    main()
