
# Note: there are other tricks that can be pulled to redirect prints,
# but this is straightforward and somewhat more dynamic.
class Print_class:
    '''
    Console printer. Supports redirection when wanted, but otherwise
    acts like a normal print.

    Attributes:
    * logging_function
      - Optional function which will be called by Print instead of
        sending to the console. The function should accept
        one argument, the message string.
    * quiet
      - Bool, if True then status lines are dropped; error lines
        (via Error) are still printed.
    '''
    def __init__(self):
        self.logging_function = None
        self.quiet = False

    def __call__(self, line = '', force = False):
        '''
        Write a status line to the console.
        If force is True, the line is written even when quiet.
        '''
        if self.quiet and not force:
            return
        self._Write(line)
        return

    def Error(self, line):
        '''
        Write an error line, prefixed with "Error: ". Never suppressed.
        '''
        self._Write('Error: {}'.format(line))
        return

    def _Write(self, line):
        # If there is a logging_function attached, call it.
        if self.logging_function != None:
            self.logging_function(line)
        else:
            print(line)
        return

# Static print object.
Print = Print_class()
