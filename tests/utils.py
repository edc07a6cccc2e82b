import os


def lf2crlf(x):
    return x.replace('\n', '\r\n')


def load(name):
    path = os.path.join(os.path.dirname(__file__), name)
    with open(path, 'r') as fp:
        return fp.read()
