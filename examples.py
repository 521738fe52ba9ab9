from eth_abi import encode

from abi_return_guesser import format_types, guess_return_types

HANDWRITTEN_TESTCASES = [
    {
        "name": 'simple uint',
        "types": ['uint256'],
        "values": [123],
    },
    {
        "name": 'simple bool',
        "types": ['bool'],
        "values": [True],
    },
    {
        "name": 'simple address',
        "types": ['address'],
        "values": ['0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'],
    },
    {
        "name": 'simple bytes4',
        "types": ['bytes4'],
        "values": [bytes.fromhex('abcdabcd')],
    },
    {
        "name": 'short string',
        "types": ['string'],
        "values": ['hello'],
    },
    {
        "name": 'long string',
        "types": ['string'],
        "values": ['this is a very long string paddingpaddingpaddingpaddingpaddingpaddingpaddingpaddingpaddingpadding'],
    },
    {
        "name": 'dynamic size uint array',
        "types": ['uint256[]'],
        "values": [[123, 456, 789, 135, 790]],
    },
    {
        "name": 'address array',
        "types": ['address[]'],
        "values": [[
            '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045',
            '0x677c09067dB0990904D01C561c32cf800a67B786',
        ]],
    },
    {
        "name": 'array of strings',
        "types": ['string[]'],
        "values": [['hello', 'world']],
    },
    {
        "name": 'address and balance',
        "types": ['address', 'uint256'],
        "values": ['0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045', 10**18],
    },
]

for testcase in HANDWRITTEN_TESTCASES:
    data = encode(testcase['types'], testcase['values'])
    guessed = guess_return_types(data)

    print(testcase['name'])
    print('Guessed types: ', format_types(guessed))
    print('Expected types:', format_types(testcase['types']))

    print('---')
    print()
