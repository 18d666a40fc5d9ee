import io
import os

import pytest

from sksh.builtins import (
    ShellExit,
    cd,
    echo,
    env_builtin,
    exit_builtin,
    export,
    is_builtin,
    pwd,
    run_builtin,
    unset,
)
from sksh.environment import Environment


def test_echo_joins_arguments_with_newline():
    out = io.StringIO()
    assert echo(["echo", "hello", "world"], out) == 0
    assert out.getvalue() == "hello world\n"


def test_echo_n_flags_suppress_newline():
    out = io.StringIO()
    echo(["echo", "-n", "-nnn", "text", "-n"], out)
    assert out.getvalue() == "text -n"


def test_echo_flag_like_but_not_n_is_printed():
    out = io.StringIO()
    echo(["echo", "-nx", "a"], out)
    assert out.getvalue() == "-nx a\n"


def test_echo_no_arguments_prints_newline():
    out = io.StringIO()
    echo(["echo"], out)
    assert out.getvalue() == "\n"


def test_cd_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    sub = tmp_path / "sub"
    sub.mkdir()
    assert cd(["cd", str(sub)], Environment()) == 0
    assert os.path.samefile(os.getcwd(), sub)


def test_cd_too_many_arguments():
    err = io.StringIO()
    assert cd(["cd", "a", "b"], Environment(), err) == 1
    assert err.getvalue() == "sksh: cd: too many arguments\n"


def test_cd_without_home():
    err = io.StringIO()
    assert cd(["cd"], Environment(), err) == 1
    assert err.getvalue() == "sksh: cd: Wrong directory\n"


def test_cd_home_and_tilde(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "inner").mkdir()
    env = Environment([f"HOME={tmp_path}"])
    assert cd(["cd", "~/inner"], env) == 0
    assert os.path.samefile(os.getcwd(), tmp_path / "inner")
    assert cd(["cd"], env) == 0
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_to_file_reports_not_a_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "file.txt"
    target.write_text("x")
    err = io.StringIO()
    assert cd(["cd", str(target)], Environment(), err) == 1
    assert err.getvalue() == f"sksh: cd: {target}: Not a directory\n"
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    missing = tmp_path / "missing"
    err = io.StringIO()
    assert cd(["cd", str(missing)], Environment(), err) == 1
    assert err.getvalue().endswith(": No such file or directory\n")


def test_pwd_prints_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert pwd(out) == 0
    assert os.path.samefile(out.getvalue().rstrip("\n"), tmp_path)
    assert out.getvalue().endswith("\n")


def test_export_sets_and_bare_name_gets_empty_value():
    env = Environment(["A=1"])
    assert export(["export", "B=2", "C"], env) == 0
    assert env.get("B") == "2"
    assert env.get("C") == ""
    assert env.get("A") == "1"


def test_export_invalid_identifier_fails_but_keeps_valid():
    env = Environment()
    err = io.StringIO()
    assert export(["export", "1bad=x", "GOOD=y"], env, err) == 1
    assert err.getvalue() == "sksh: not a valid identifier\n"
    assert env.get("GOOD") == "y"
    assert env.get("1bad") is None


def test_unset_removes_variables():
    env = Environment(["A=1", "B=2"])
    assert unset(["unset", "A", "MISSING"], env) == 0
    assert env.get("A") is None
    assert list(env) == ["B=2"]


def test_env_prints_visible_lines_only():
    out = io.StringIO()
    env = Environment(["A=1", "?=0", "B=2"])
    assert env_builtin(["env"], env, out) == 0
    assert out.getvalue() == "A=1\nB=2\n"


def test_env_assignment_does_not_touch_original():
    out = io.StringIO()
    env = Environment(["A=1"])
    assert env_builtin(["env", "A=9", "Z=3"], env, out) == 0
    assert out.getvalue() == "A=9\nZ=3\n"
    assert list(env) == ["A=1"]


def test_env_invalid_assignment_fails():
    err = io.StringIO()
    out = io.StringIO()
    assert env_builtin(["env", "9X=1"], Environment(), out, err) == 1
    assert err.getvalue() == "sksh: not a valid identifier\n"
    assert out.getvalue() == ""


def test_env_runs_command_through_runner():
    calls = []

    def runner(argv, scope):
        calls.append((argv, scope.get("FOO")))
        return 7

    env = Environment()
    status = env_builtin(["env", "FOO=bar", "cmd", "arg"], env, runner=runner)
    assert status == 7
    assert calls == [(["cmd", "arg"], "bar")]
    assert env.get("FOO") is None


def test_env_default_runner_runs_builtins():
    out = io.StringIO()
    assert env_builtin(["env", "echo", "hi"], Environment(), out) == 0
    assert out.getvalue() == "hi\n"


def test_env_default_runner_rejects_unknown_command():
    err = io.StringIO()
    assert env_builtin(["env", "nosuch"], Environment(), io.StringIO(), err) == 127
    assert "nosuch" in err.getvalue()


def test_exit_without_arguments():
    out = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["exit"], out)
    assert info.value.status == 0
    assert out.getvalue() == "exit\n"


def test_exit_with_number():
    with pytest.raises(ShellExit) as info:
        exit_builtin(["exit", "42"], io.StringIO())
    assert info.value.status == 42


def test_exit_status_wraps_to_byte():
    with pytest.raises(ShellExit) as info:
        exit_builtin(["exit", "300"], io.StringIO())
    assert info.value.status == 44
    with pytest.raises(ShellExit) as negative:
        exit_builtin(["exit", "-1"], io.StringIO())
    assert negative.value.status == 255


def test_exit_non_numeric_argument():
    err = io.StringIO()
    with pytest.raises(ShellExit) as info:
        exit_builtin(["exit", "abc"], io.StringIO(), err)
    assert info.value.status == 2
    assert err.getvalue() == "sksh: exit: abc: numeric argument required\n"


def test_exit_too_many_arguments_does_not_exit():
    out = io.StringIO()
    err = io.StringIO()
    assert exit_builtin(["exit", "1", "2"], out, err) == 1
    assert out.getvalue() == ""
    assert err.getvalue() == "sksh: exit: too many arguments\n"


@pytest.mark.parametrize("name", ["echo", "env", "pwd", "export", "unset", "cd", "exit", None])
def test_is_builtin_true(name):
    assert is_builtin(name) is True


@pytest.mark.parametrize("name", ["ls", "", "ECHO", "echo2"])
def test_is_builtin_false(name):
    assert is_builtin(name) is False


def test_run_builtin_dispatches_echo():
    out = io.StringIO()
    assert run_builtin(["echo", "x"], Environment(), out) == 0
    assert out.getvalue() == "x\n"


def test_run_builtin_empty_and_unknown():
    assert run_builtin([], Environment()) == 1
    assert run_builtin(["ls"], Environment()) == 0


def test_run_builtin_export_and_unset_modify_env():
    env = Environment()
    run_builtin(["export", "K=v"], env)
    assert env.get("K") == "v"
    run_builtin(["unset", "K"], env)
    assert env.get("K") is None


def test_run_builtin_exit_raises():
    with pytest.raises(ShellExit) as info:
        run_builtin(["exit", "5"], Environment(), io.StringIO())
    assert info.value.status == 5