import logging

decoder_logger = logging.getLogger("cookiedecoder.decoder")
internal_logger = logging.getLogger("cookiedecoder.internal")
