# main.py

import sys

from colorama import Fore

from animators import LoopAnimator
from codec import load_animation, save_animation
from errors import AnimationError
from frames import Animation, Frame
from prompts import LineInput
from terminal import TerminalSession


MENU = [
    ("n", "Next frame"),
    ("p", "Previous frame"),
    ("1", "Play animation"),
    ("2", "Edit current frame"),
    ("3", "Add new frame"),
    ("4", "Delete current frame"),
    ("5", "Reorder frames"),
    ("6", "Adjust speed"),
    ("7", "Save animation"),
    ("8", "Load animation"),
    ("q", "Quit"),
]


class AnimationMenu:
    def __init__(self, animation, session, line_input=None):
        if not isinstance(animation, Animation):
            raise ValueError("Must pass an Animation.")
        self.animation = animation
        self.session = session
        self.line_input = line_input or LineInput()
        self.actions = {
            "n": self.next_frame,
            "p": self.previous_frame,
            "1": self.play,
            "2": self.edit_frame,
            "3": self.add_new_frame,
            "4": self.delete_current_frame,
            "5": self.reorder_frames,
            "6": self.adjust_speed,
            "7": self.save,
            "8": self.load,
        }

    def _show_menu(self):
        self.session.clear()
        if len(self.animation):
            print(Fore.CYAN + f"Frame {self.animation.current_frame + 1}/{len(self.animation)}\n")
            print(Fore.GREEN + str(self.animation.current()))
        print("\n=== Main Menu ===")
        for key, label in MENU:
            if key == "6":
                label += f" (current: {self.animation.speed}ms)"
            print(f"{key}. {label}")

    def run(self):
        while True:
            self._show_menu()
            choice = self.session.read_key()
            if choice == "q":
                print("Goodbye!")
                return
            action = self.actions.get(choice)
            if action is None:
                continue
            try:
                action()
            except AnimationError as e:
                print(Fore.RED + f"Error: {e}")
                self.line_input.read_line("Press Enter to continue...")

    def next_frame(self):
        self.animation.next_frame()

    def previous_frame(self):
        self.animation.previous_frame()

    def play(self):
        LoopAnimator(self.animation).animate(self.session)

    def edit_frame(self):
        frame = self.animation.current()
        while True:
            self.session.clear()
            print("Editing current frame. Commands:")
            print("'a' to add a line, 'e <line_number>' to edit a line, 'd <line_number>' to delete a line")
            print("'q' to finish editing\n")
            for i, line in enumerate(frame.content):
                print(f"{i}: {line}")
            parts = self.line_input.read_line("> ").split()
            command = parts[0] if parts else ""
            if command == "q":
                return
            if command == "a":
                frame.add_line(self.line_input.read_line("Enter new line: ").rstrip())
                continue
            if command in ("e", "d") and len(parts) > 1 and parts[1].isdecimal():
                index = int(parts[1])
                try:
                    if command == "e":
                        old = frame.line(index)
                        new = self.line_input.read_line(f"Line {index} was {old!r}. New content: ")
                        frame.set_line(index, new.rstrip())
                    else:
                        frame.delete_line(index)
                except AnimationError as e:
                    print(Fore.RED + str(e))
                    self.line_input.read_line("Press Enter to continue...")
                continue
            print(Fore.RED + "Invalid command")
            self.line_input.read_line("Press Enter to continue...")

    def add_new_frame(self):
        self.session.clear()
        lines = self.line_input.read_lines("Adding a new frame. Enter content (empty line to finish):")
        if not lines:
            print(Fore.MAGENTA + "Empty frame discarded.")
            return
        self.animation.add_frame(Frame(lines))

    def delete_current_frame(self):
        if self.animation.delete_frame(self.animation.current_frame) is None:
            print(Fore.MAGENTA + "Cannot delete the last remaining frame.")
            self.line_input.read_line("Press Enter to continue...")

    def reorder_frames(self):
        self.session.clear()
        print("Current frame order:")
        for i, frame in enumerate(self.animation.frames):
            print(f"{i}. {len(frame)} lines")
        values = self.line_input.read_ints(
            "\nEnter the frame number to move, followed by its new position: "
        )
        if len(values) != 2:
            print(Fore.RED + "Expected two frame numbers.")
            self.line_input.read_line("Press Enter to continue...")
            return
        self.animation.move_frame(values[0], values[1])

    def adjust_speed(self):
        value = self.line_input.read_int("Enter new speed in milliseconds: ")
        if value is None:
            print(Fore.RED + "Speed must be a whole number.")
            self.line_input.read_line("Press Enter to continue...")
            return
        self.animation.set_speed(value)

    def save(self):
        path = self.line_input.read_line("Enter filename to save: ").strip()
        save_animation(self.animation, path)
        print(Fore.MAGENTA + f"Animation saved to {path}")
        self.line_input.read_line("Press Enter to continue...")

    def load(self):
        path = self.line_input.read_line("Enter filename to load: ").strip()
        self.animation = load_animation(path)
        print(Fore.MAGENTA + f"Animation loaded from {path}")
        self.line_input.read_line("Press Enter to continue...")


def build_demo_frames():
    return [
        Frame(["  o  ", " /|\\ ", " / \\ "]),
        Frame(["  o  ", " /|\\ ", " | | "]),
    ]


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        try:
            animation = load_animation(argv[0])
        except AnimationError as e:
            print(Fore.RED + f"Error: {e}")
            return 1
    else:
        animation = Animation()
        for frame in build_demo_frames():
            animation.add_frame(frame)

    with TerminalSession() as session:
        AnimationMenu(animation, session).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
