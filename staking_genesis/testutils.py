import json
import os

from staking_genesis.utils import decode_hex
from staking_genesis.validators import BLSValidator, ECDSAValidator, ValidatorSet

fixture_path = os.path.join(os.path.dirname(__file__), '..', 'fixtures')


def get_tests_from_file_or_dir(dname, json_only=True):
    if os.path.isfile(dname):
        if dname[-5:] == '.json' or not json_only:
            with open(dname) as f:
                return {dname: json.load(f)}
        else:
            return {}
    else:
        o = {}
        for f in sorted(os.listdir(dname)):
            fullpath = os.path.join(dname, f)
            for k, v in list(get_tests_from_file_or_dir(fullpath, True).items()):
                o[k] = v
        return o


def generate_test_params(testsource, metafunc):
    if not {'filename', 'testname', 'testdata'} <= set(metafunc.fixturenames):
        return

    fixtures = get_tests_from_file_or_dir(
        os.path.join(fixture_path, testsource))

    base_dir = os.path.dirname(os.path.dirname(__file__))
    params = []
    for filename, tests in fixtures.items():
        if isinstance(tests, dict):
            filename = os.path.relpath(filename, base_dir)
            for testname, testdata in tests.items():
                params.append((filename, testname, testdata))

    metafunc.parametrize(
        ('filename', 'testname', 'testdata'),
        params
    )
    return params


def validators_from_fixture(entries):
    validators = []
    for entry in entries:
        if 'blsPublicKey' in entry:
            validators.append(BLSValidator(entry['address'], decode_hex(entry['blsPublicKey'])))
        else:
            validators.append(ECDSAValidator(entry['address']))
    return ValidatorSet(validators)


def storage_from_fixture(storage):
    return dict((decode_hex(k), decode_hex(v)) for k, v in storage.items())
