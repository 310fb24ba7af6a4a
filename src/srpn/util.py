class SRPNError(Exception):
    '''
    User-facing calculator error.

    The first argument is always the exact diagnostic to print.
    '''
    MESSAGE = None

    def __init__(self, *args):
        super().__init__(*(args or (self.MESSAGE,)))


class StackEmpty(SRPNError):
    MESSAGE = 'Stack empty.'


class StackUnderflow(SRPNError):
    MESSAGE = 'Stack underflow.'


class StackOverflow(SRPNError):
    MESSAGE = 'Stack overflow.'


class DivideByZero(SRPNError):
    MESSAGE = 'Divide by 0.'


class UnrecognisedToken(SRPNError):
    def __init__(self, token):
        super().__init__('Unrecognised operator or operand "{}".'.format(token),
                         token)
