import sys
import subprocess
import datetime


def run(cmd: str):
    print(f"@ {cmd}")
    subprocess.call(cmd, shell=True)


def build_f():
    run(f"{sys.executable} -m pip install -e .[test]")


def test_f():
    run(f"{sys.executable} -m pytest -v")


def all_f():
    build_f()
    test_f()


def sample_f():
    import hexify
    from hexify_format import Format

    with open('pyproject.toml', 'rb') as f:
        print(hexify.xxd_str(f, Format(size=16, pack=(2, 4), gaps=(1, 4))), end='')


def usage():
    [print(cmd[:-2]) for cmd in globals() if cmd.endswith('_f')]


for cmd in sys.argv[1:]:
    started = datetime.datetime.now()
    print(cmd)
    globals()[f"{cmd}_f"]()
    print(">", f"{datetime.datetime.now() - started}")

if len(sys.argv) < 2:
    usage()
