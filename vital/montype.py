# Copyright 2025, Scott Smith.  MIT License (see LICENSE).

# Monitor type codes stored in track info packets, mapped to the
# standardized parameter name the track carries regardless of what the
# device called it.

montypes = {
    1: 'ECG_WAV',
    2: 'ECG_HR',
    3: 'ECG_PVC',
    4: 'IABP_WAV',
    5: 'IABP_SBP',
    6: 'IABP_DBP',
    7: 'IABP_MBP',
    8: 'PLETH_WAV',
    9: 'PLETH_HR',
    10: 'PLETH_SPO2',
    11: 'RESP_WAV',
    12: 'RESP_RR',
    13: 'CO2_WAV',
    14: 'CO2_RR',
    15: 'CO2_CONC',
    16: 'NIBP_SBP',
    17: 'NIBP_DBP',
    18: 'NIBP_MBP',
    19: 'BT',
    20: 'CVP_WAV',
    21: 'CVP_CVP',
    22: 'EEG_BIS',
    23: 'TV',
    24: 'MV',
    25: 'PIP',
    26: 'AGENT1_NAME',
    27: 'AGENT1_CONC',
    28: 'AGENT2_NAME',
    29: 'AGENT2_CONC',
    30: 'DRUG1_NAME',
    31: 'DRUG1_CE',
    32: 'DRUG2_NAME',
    33: 'DRUG2_CE',
    34: 'CO',
    36: 'EEG_SEF',
    38: 'PEEP',
    39: 'ECG_ST',
    40: 'AGENT3_NAME',
    41: 'AGENT3_CONC',
    42: 'STO2_L',
    43: 'STO2_R',
    44: 'EEG_WAV',
    45: 'FLUID_RATE',
    46: 'FLUID_TOTAL',
    47: 'SVV',
    49: 'DRUG3_NAME',
    50: 'DRUG3_CE',
    70: 'PSI',
    71: 'PVI',
    72: 'SPHB',
    73: 'ORI',
    75: 'ASKNA',
    76: 'PAP_SBP',
    77: 'PAP_MBP',
    78: 'PAP_DBP',
    79: 'FEM_SBP',
    80: 'FEM_MBP',
    81: 'FEM_DBP',
    82: 'EEG_SEFL',
    83: 'EEG_SEFR',
    84: 'EEG_SR',
    85: 'TOF_RATIO',
    86: 'TOF_CNT',
    87: 'SKNA_WAV',
    88: 'ICP',
    89: 'CPP',
    90: 'ICP_WAV',
    91: 'PAP_WAV',
    92: 'FEM_WAV',
    93: 'ALARM_LEVEL',
    95: 'EEGL_WAV',
    96: 'EEGR_WAV',
    97: 'ANII',
    98: 'ANIM',
    99: 'PTC_CNT',
}

def montype_name(code):
    return montypes.get(code)
