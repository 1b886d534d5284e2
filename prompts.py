# prompts.py


class LineInput:
    def __init__(self, input_func=input):
        self.input_func = input_func

    def read_line(self, prompt=""):
        return self.input_func(prompt)

    def read_int(self, prompt=""):
        text = self.read_line(prompt).strip()
        try:
            return int(text)
        except ValueError:
            return None

    def read_ints(self, prompt=""):
        values = []
        for part in self.read_line(prompt).split():
            try:
                values.append(int(part))
            except ValueError:
                continue
        return values

    def read_lines(self, prompt=""):
        """Collect lines until an empty one. Trailing whitespace is dropped."""
        lines = []
        if prompt:
            print(prompt)
        while True:
            line = self.read_line()
            if not line.strip():
                return lines
            lines.append(line.rstrip())
